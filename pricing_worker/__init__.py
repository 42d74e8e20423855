"""
Pricing Worker - Competing-consumer pricing pipeline

Packages:
- apps.worker: queue consumer, discount transform, result reporting
- apps.supervisor: worker pool and run report
- apps.producer: queue seeding
- utils: settings, logging, schemas, Redis queue wrapper, discount table
"""

__version__ = "0.1.0"
