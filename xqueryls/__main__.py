"""
This file is executed when running: python -m xqueryls
"""
from xqueryls.main import main

if __name__ == "__main__":
    main()
