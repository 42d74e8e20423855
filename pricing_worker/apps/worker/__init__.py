"""
Worker App - Competing Consumer

Responsibilities:
- Blocking pops from the shared Redis list `events_queue` (5s timeout)
- Weekday discount transform (total = price * (1 - discount/100))
- MD5 fingerprint of the raw payload
- One-way result reporting: [timestamp_ms, index, fingerprint]

Stops on idle timeout or an empty payload; malformed payloads abort the worker.
"""
