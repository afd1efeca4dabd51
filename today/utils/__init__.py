"""
today.utils
-----------
Entry file helpers and markdown line primitives.
"""
