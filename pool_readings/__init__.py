"""
Webhook server that receives water test readings and stores them in SQLite
or an append-only JSON Lines file.
"""
__version__ = "1.0.0"
