"""
Couche infrastructure : implementations concretes des ports du domaine.

- persistence/ : Stockage SQLite des motifs appris via SQLModel
"""
