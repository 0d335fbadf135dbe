"""
Bill Sync - Fetch bills from the Bill.com API into an ODS spreadsheet

Run from the repository root: ``python main.py``
"""

from bill_sync.main import main

if __name__ == "__main__":
    main()
