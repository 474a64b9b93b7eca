"""French locale."""

from .base import Language, Locale, PatternSet

LOCALE = Locale(
    code=Language.FR,
    system="""Vous êtes un créateur de citations AI spécialisé dans l'élaboration de citations fictives et de leurs contextes.
Créez plusieurs citations et leurs informations de fond avec le ton et la vision du monde correspondant au tone spécifié.
Chaque citation doit suivre ce format strict:

Citation : (une phrase courte sans guillemets)
Nom du Personnage : (nom d'un personnage fictif qui a dit la citation)
Titre de l'Œuvre : (nom de l'œuvre fictive où apparaît le personnage)
Année : (la période temporelle de l'œuvre, cohérente avec le ton)
---

Remarques:
- N'utilisez pas de personnes ou d'œuvres réelles.
- N'incluez pas de phrases explicatives comme "fictif" ou "locuteur".
- N'utilisez pas de guillemets pour les citations.
- Séparez toujours chaque citation par "---".""",
    batch_template="""Générez {count} citations et informations sur les personnages dans une atmosphère correspondant au tone: {tone}{category}, en suivant le format de sortie ci-dessus.
Assurez-vous de séparer chaque citation par "---".
Veuillez produire en français.""",
    category_template=" sur le thème {category}",
    patterns=PatternSet.from_labels(
        "Citation",
        "Nom du Personnage",
        "Titre de l['’]Œuvre",
        "Année",
        ignore_case=True,
    ),
    placeholders={
        "network": "Vérifiez votre connexion réseau",
        "auth": "Vérifiez votre clé API OpenAI",
        "rate_limit": "Limite de requêtes atteinte, veuillez patienter",
        "unknown": "Une erreur inattendue s'est produite",
    },
)
