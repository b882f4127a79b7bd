"""
Vido - Catalogue auto-heberge de videotheque personnelle.

Ce package fournit le moteur d'apprentissage de motifs de noms de fichiers :
un motif est appris a partir d'une correction manuelle, puis reutilise pour
associer automatiquement les nouveaux fichiers a leurs metadonnees.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (extraction, matching, cas d'utilisation)
- infrastructure/ : Persistance SQLite via SQLModel
- adapters/ : Interface en ligne de commande
"""
