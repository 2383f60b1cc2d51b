"""Key and order data records into shards and stream them to an asynchronous consumer."""

__version__ = "0.1.0"