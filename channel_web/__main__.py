"""Allow ``python -m channel_web``."""

from channel_web.main import main

if __name__ == "__main__":
    main()
