"""
Data processing for the sleep tracker export: parsing, feature
derivation and subset selection.
"""
