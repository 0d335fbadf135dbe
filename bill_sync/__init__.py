"""
Bill Sync - Fetch bills from the Bill.com API and organize them in an ODS spreadsheet

This package provides functionality to:
- Page through the remote bills endpoint with a hard page ceiling
- Normalize raw bill records and annotate them with ordered transformation rules
- Write the transformed bills into an ODS sheet with backup and restore
"""
