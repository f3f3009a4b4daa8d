"""
The MODEL layer contains pure data structures and file I/O.
It has NO knowledge of the packing algorithm or of the visualization.
"""
