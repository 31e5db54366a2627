from algokit.trees.binary_tree import NIL, BinaryTree
