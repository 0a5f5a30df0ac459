import sys

from poly_regression.cli import main


if __name__ == "__main__":
	sys.exit(main())
