import sys

from pwt_agent.ui.cli.app import main

sys.exit(main())
