__version__ = '26.10.0'
_release = '1'
_commit = '0000000'
