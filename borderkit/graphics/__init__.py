"""Graphics primitives: colors, paths, outlines, shapes, brushes, canvas."""
