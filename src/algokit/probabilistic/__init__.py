from algokit.probabilistic.bloom import BloomFilter, CountingBloomFilter, optimal_parameters
from algokit.probabilistic.hashing import hash64, hash_pair, to_bytes
from algokit.probabilistic.minhash import MinHash, jaccard
from algokit.probabilistic.simhash import hamming_distance, simhash, simhash_similarity
from algokit.probabilistic.similarity import cosine_similarity, top_k_similar
from algokit.probabilistic.xor_filter import XorFilter
