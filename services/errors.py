class BudgetServiceError(Exception):
    """Erreur de base du service de budget"""


class AuthorNotFoundError(BudgetServiceError, LookupError):
    """L'auteur référencé par authorId n'existe pas"""

    def __init__(self, author_id: int):
        self.author_id = author_id
        super().__init__(f"Auteur {author_id} non trouvé")
