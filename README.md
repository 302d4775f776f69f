# kadroute

kadroute provides building blocks for a Kademlia-style distributed hash table node:

- `kadroute.routing_table.RoutingTable` keeps known peers in k-buckets. It
  walks them bucket by bucket, starting near a target id.
- `kadroute.timer.Timer` runs any number of timeouts on a single asyncio
  timer handle.
- `kadroute.value_store.ValueStore` is a mutable mapping whose keys are byte
  sequences. `hash_key` turns such a key into a 64-bit hash.

The package needs Python 3.10 or later and uses only the standard library.

## Installation

```
pip install kadroute
```

To run the tests, install the test extra and then run pytest:

```
pip install "kadroute[test]"
pytest
```

## Routing table

An id is a non-negative integer of `bit_size` bits (160 by default). Bit 0 is
the most significant bit. A peer goes into the bucket whose index is the first
bit at which the peer's id differs from the table's own id. A peer whose id
equals the table's own id goes into the last bucket.

```python
from kadroute.routing_table import RoutingTable

table = RoutingTable(0x80 << 152, k_bucket_size=20, bit_size=160)

table.push(0x40 << 152, ("10.0.0.2", 27980))   # True: the peer was added
table.push(0x40 << 152, ("10.0.0.2", 27980))   # False: this id is already known
len(table)                                     # 1

for peer_id, peer in table.find(0x41 << 152):
    print(hex(peer_id), peer)

table.remove(0x40 << 152)                      # True
table.remove(0x40 << 152)                      # False: no longer known
print(table)                                   # JSON-like summary of every bucket
```

- `push(peer_id, peer)` returns `False` in two cases:
  - the id is already in its bucket;
  - the bucket already holds `k_bucket_size` peers and is not the one bucket
    that the table lets grow beyond that size.
- `remove(peer_id)` returns `True` if the peer was removed.
- `find(id_to_find)` returns a generator of `(id, peer)` pairs. Its start
  bucket is the later of two: the target's bucket, or the first bucket reached
  once the buckets from index 0 upward hold more than `k_bucket_size` peers
  together. From there it walks down to bucket 0, and it yields the peers of
  each bucket in the order they were added.
- Iterating over the table yields every peer the same way, from the last
  bucket down to bucket 0.
- `my_id`, `k_bucket_size` and `bit_size` are read-only properties.
- The module-level constants `DEFAULT_K_BUCKET_SIZE` (20) and
  `DEFAULT_BIT_SIZE` (160) hold the defaults.

The table raises errors for bad input:

- An id that is not an `int` raises `TypeError`. A `bool` counts as not an
  `int`.
- An id that does not fit in `bit_size` bits raises `ValueError`.
- A `k_bucket_size` or `bit_size` that is not positive raises `ValueError`.

## Timer

```python
import asyncio
from kadroute.timer import Timer

async def main():
    timer = Timer(asyncio.get_running_loop())
    timer.expires_from_now(0.5, lambda: print("half a second"))
    timer.expires_from_now(0.1, lambda: print("a tenth"))
    print(timer.pending())   # 2
    await asyncio.sleep(0.6)

asyncio.run(main())
```

- `expires_from_now` takes its timeout as a number of seconds or as a
  `datetime.timedelta`. It measures the timeout on the event loop's clock.
- If no loop is passed to `Timer()`, the running loop is used the first time
  a timeout is set.
- Callbacks that share an expiration time run together, in the order they
  were registered.
- `pending()` returns the number of callbacks still waiting.
- `cancel()` drops all of them.

## Value store

```python
from kadroute.value_store import ValueStore, hash_key

store = ValueStore({b"key": b"data"})
store[bytes([1, 2, 3])] = b"more"
store[[1, 2, 3]]                # b"more": any byte sequence finds the same entry
list(store)                     # [b"key", b"\x01\x02\x03"]
hash_key(b"key") == hash_key([107, 101, 121])   # True
```

The store converts every key to `bytes`.

- A `str` or `int` key raises `TypeError`, as does any other key that cannot
  be converted to bytes.
- An `in` test with such a key returns `False` instead of raising.
- `hash_key` accepts the same kinds of key as the store.

## What this package does not do

kadroute holds the in-memory parts of a DHT node: it sends and receives
nothing. It has none of the following:

- a wire format for messages;
- sockets;
- peer lookups over the network;
- a session or server that runs a node;
- a command-line program.

The value store keeps its data in memory only.