import sys

from binfloat.cli import main

sys.exit(main())
