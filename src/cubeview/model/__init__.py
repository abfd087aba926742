"""
The MODEL layer contains pure data structures and the projection pipeline math.
It has NO knowledge of the GUI (Qt) or of drawing.
It deals with Geometry, Transforms, Projection and I/O.
"""
