"""
OperatorIdentity Entity - Identite verifiee d'un operateur privilegie.

Responsabilite unique:
----------------------
Porter l'identifiant (claim "sub") extrait d'un token valide.
Jamais persistee par ce service: reconstruite a chaque requete.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OperatorIdentity:
    """
    Identite d'un appelant authentifie et autorise.

    Attributes:
        subject: Identifiant opaque du sujet (claim "sub").
    """

    subject: str
