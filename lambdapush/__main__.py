import sys

from lambdapush.cli import main

sys.exit(main())
