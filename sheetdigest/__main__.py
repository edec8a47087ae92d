import sys

from sheetdigest.pipeline import main

sys.exit(main())
