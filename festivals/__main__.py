import sys

from festivals.demo import main

sys.exit(main())
