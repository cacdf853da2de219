"""
pactverify: replay consumer-driven contracts against a live provider.
"""

__version__ = "0.1.0"

from pactverify.pact import PactFile, load_pact_file  # noqa: E402

__all__ = ["PactFile", "load_pact_file", "__version__"]
