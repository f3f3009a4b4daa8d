"""
The ENGINE layer turns a StoneParameters record into a Layout:
sequence generator, coursing patterns, row packer and layout assembler.
"""
