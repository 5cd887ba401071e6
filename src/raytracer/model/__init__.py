"""
The MODEL layer contains pure data structures and the math that acts on them.
It has NO knowledge of files, plotting, or the demo that drives it.
It deals with Tuples, Points, Vectors, Colors, Matrices and the Canvas.
"""
