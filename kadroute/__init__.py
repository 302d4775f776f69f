"""Routing table, asyncio timer and byte-keyed value store for Kademlia-style DHT nodes."""

__version__ = "0.1.0"
__all__ = ["routing_table", "timer", "value_store"]