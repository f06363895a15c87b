# topmark:header:start
#
#   project      : PropLay
#   file         : __init__.py
#   file_relpath : src/proplay/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-preserving layout of properties files.

Comment normalization, tokenizing, the layout model, and the loader, saver and
synchronizer that tie a layout to a logical store.
"""
