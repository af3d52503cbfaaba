"""Allow running as a module: python -m tsinit."""

from tsinit.bin import main

if __name__ == "__main__":
    main()
