"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of any user interface or of persistence.
It deals with component placement, ring patterns and bounds.
"""
