import sys

from rglister.run import main

if __name__ == '__main__':
  sys.exit(main())
