import sys

from mario_leaderboard.cli import main

sys.exit(main())
