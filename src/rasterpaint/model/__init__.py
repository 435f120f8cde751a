"""
The MODEL layer contains pure data structures and the rasterization logic.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Pixels and drawing State.
"""
