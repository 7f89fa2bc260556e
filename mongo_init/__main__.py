import sys

from mongo_init.main import main

sys.exit(main())
