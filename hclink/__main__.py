import sys

from hclink.cli import main

sys.exit(main())
