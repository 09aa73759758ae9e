"""Strategy Gateway.

Command gateway for the activation-strategy registry of a feature-flag
service. Mutations are recorded as immutable domain events; reads are served
from a separately maintained projection.
"""

__version__ = "0.1.0"
