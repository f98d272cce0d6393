# src/safewire/net/__init__.py
"""
safewire wire package

  - tags: the type tag registry (one stable u64 per variant)
  - envelope: [tag][fields] msgpack framing and field-shape helpers
  - payload: opaque tagged carrier that can forward unknown variants
  - codec: tag-dispatching decoder, Unknown(tag) for unregistered tags
  - net_logging: JSONL event logging

Callers outside this package should only need net.codec (decode / encode_value)
and the variant classes themselves.
"""
