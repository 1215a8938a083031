import sys

from lane_train.play import main

sys.exit(main())
