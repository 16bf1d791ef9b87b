import sys

from crgl.cli.main import main

sys.exit(main())
