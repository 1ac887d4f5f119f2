"""
nifi_pki — certificate identities and NifiUser resources for NiFi clusters.

Maps a cluster topology to the canonical names (CN, DNS SANs, secret and
user names) of every node and of the controller principal, and builds the
desired set of NifiUser resources an operator should keep in place.
"""

__version__ = "0.1.0"
