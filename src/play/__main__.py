import sys

from play.main import main

sys.exit(main())
