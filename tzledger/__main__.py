"""Allow ``python -m tzledger``."""

from tzledger.interfaces.api.app import main

main()
