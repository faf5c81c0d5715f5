import sys

from chessfinder.app import main

sys.exit(main())
