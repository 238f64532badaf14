"""
Presentation Layer - Interface HTTP du service.

Cette couche traduit les requetes HTTP en appels aux use cases
et les exceptions du domaine en reponses {"error": ...}.
"""
