from algokit.structures.bimap import BiMap
from algokit.structures.bk_tree import BKTree
from algokit.structures.lru_cache import LRUCache
from algokit.structures.ring_buffer import RingBuffer
from algokit.structures.segment_tree import FenwickTree, SegmentTree
from algokit.structures.skip_list import SkipList
from algokit.structures.trie import Trie
