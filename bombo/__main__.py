import sys

from bombo.app import main

sys.exit(main())
