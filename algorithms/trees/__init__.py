"""
algorithms/trees/
-----------------
Binary-tree traversals and search-tree maintenance.  Trees are nested
dicts  {"id", "value", "left", "right"}  (AVL nodes add "height");
`id` is stable across rotations so a renderer can animate moves.
"""
