"""
media-renamer - Renommage des medias telecharges et arborescence Plex.

Ce package parcourt un repertoire de telechargements, identifie les episodes
de series et les films a partir de leur nom de fichier, confirme le titre
aupres de TheTVDB puis deplace, copie ou lie chaque fichier vers
TV/<serie>/Season N/... ou Movies/<titre> (annee)/...

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur)
- services/ : Couche application (resolution des chemins, transfert, orchestration)
- adapters/ : Couche infrastructure (CLI, parcours disque, parsing, client TVDB)
"""

__version__ = "0.1.0"
