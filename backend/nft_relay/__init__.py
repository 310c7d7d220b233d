"""
NFT Relay backend.

Forwards NFT validation and analytics requests to the bitsCrunch API and
returns the provider's answer in a uniform envelope.
"""

__version__ = "1.0.0"
