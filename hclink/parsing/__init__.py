"""
This package contains the modules that decode JSON responses received from
the hub into typed values.

Sub-packages:

- ``refresh``: inventory, refresh-status and change-set decoding.
"""
