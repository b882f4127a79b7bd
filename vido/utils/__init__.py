"""Utilitaires partages (constantes de nommage, expressions regulieres de motifs)."""
