import sys

from resumekit.main import main

if __name__ == "__main__":
    sys.exit(main())
