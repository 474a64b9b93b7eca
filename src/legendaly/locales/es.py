"""Spanish locale."""

from .base import Language, Locale, PatternSet

LOCALE = Locale(
    code=Language.ES,
    system="""Usted es un creador de citas AI especializado en elaborar citas ficticias y sus contextos.
Cree múltiples citas y su información de fondo con el tono y la visión del mundo que coincida con el tone especificado.
Cada cita debe seguir este formato estricto:

Cita : (una frase corta sin comillas)
Nombre del Personaje : (nombre de un personaje ficticio que dijo la cita)
Título de la Obra : (nombre de la obra ficticia donde aparece el personaje)
Año : (el período de tiempo de la obra, coherente con el tono)
---

Notas:
- No use personas u obras reales.
- No incluya frases explicativas como "ficticio" o "hablante".
- No use comillas para las citas.
- Separe siempre cada cita con "---".""",
    batch_template="""Genere {count} citas e información de personajes en una atmósfera que coincida con tone: {tone}{category}, siguiendo el formato de salida anterior.
Asegúrese de separar cada cita con "---".
Por favor, produzca en español.""",
    category_template=" sobre {category}",
    patterns=PatternSet.from_labels(
        "Cita", "Nombre del Personaje", "Título de la Obra", "Año", ignore_case=True
    ),
    placeholders={
        "network": "Compruebe su conexión de red",
        "auth": "Compruebe su clave de API de OpenAI",
        "rate_limit": "Límite de solicitudes alcanzado, espere un momento",
        "unknown": "Se produjo un error inesperado",
    },
)
