import sys

from weatherreport.cli import main

sys.exit(main())
