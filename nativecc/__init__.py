"""nativecc command line tool.

Compiles native sources with given toolchain using `libnativecc` library.
"""
