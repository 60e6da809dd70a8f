import sys

from resumekit.main import main

sys.exit(main())
