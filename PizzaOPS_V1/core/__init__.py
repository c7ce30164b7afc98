"""Moteur de la simulation : clôture mensuelle, historique, revue d'analyste et session de jeu."""
