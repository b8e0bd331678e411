"""RLP sedes for the log encodings.

Field layouts:
- consensus / current storage: (address, topics, data)
- legacy storage: consensus fields + (block_number, tx_hash, tx_index, block_hash, index)
"""

from __future__ import annotations

from rlp.sedes import Binary, CountableList, List, big_endian_int, binary

address = Binary.fixed_length(20)
hash32 = Binary.fixed_length(32)

LOG_FIELDS = List([address, CountableList(hash32), binary])

LEGACY_DERIVED_FIELDS = List([big_endian_int, hash32, big_endian_int, hash32, big_endian_int])

CONSENSUS_FIELD_COUNT = len(LOG_FIELDS)
LEGACY_FIELD_COUNT = CONSENSUS_FIELD_COUNT + len(LEGACY_DERIVED_FIELDS)
