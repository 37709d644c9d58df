"""Nutrient vocabulary shared by the extractor and the record assembler."""

from enum import StrEnum


class NutrientField(StrEnum):
    """Nutrient fields of the output record that come from the nutrient table."""

    CARBOHYDRATE = "carbohydrate"
    PROTEIN = "protein"
    FAT = "fat"
    SATURATED_FAT = "saturated_fat"
    POLYUNSATURATED_FAT = "polyunsaturated_fat"
    MONOUNSATURATED_FAT = "monounsaturated_fat"
    TRANS_FAT = "trans_fat"
    CHOLESTEROL = "cholesterol"
    SODIUM = "sodium"
    POTASSIUM = "potassium"
    DIETARY_FIBER = "dietary_fiber"
    SUGARS = "sugars"
    ADDED_SUGARS = "added_sugars"
    VITAMIN_A = "vitamin_a"
    VITAMIN_C = "vitamin_c"
    VITAMIN_D = "vitamin_d"
    CALCIUM = "calcium"
    IRON = "iron"


# Page labels per field, Portuguese first.
NUTRIENT_LABELS: dict[NutrientField, tuple[str, str]] = {
    NutrientField.CARBOHYDRATE: ("Carboidratos", "Total Carbohydrate"),
    NutrientField.PROTEIN: ("Proteínas", "Protein"),
    NutrientField.FAT: ("Gorduras", "Total Fat"),
    NutrientField.SATURATED_FAT: ("Gordura Saturada", "Saturated Fat"),
    NutrientField.POLYUNSATURATED_FAT: (
        "Gordura Poliinsaturada",
        "Polyunsaturated Fat",
    ),
    NutrientField.MONOUNSATURATED_FAT: (
        "Gordura Monoinsaturada",
        "Monounsaturated Fat",
    ),
    NutrientField.TRANS_FAT: ("Gordura Trans", "Trans Fat"),
    NutrientField.CHOLESTEROL: ("Colesterol", "Cholesterol"),
    NutrientField.SODIUM: ("Sódio", "Sodium"),
    NutrientField.POTASSIUM: ("Potássio", "Potassium"),
    NutrientField.DIETARY_FIBER: ("Fibras", "Dietary Fiber"),
    NutrientField.SUGARS: ("Açúcar", "Sugars"),
    NutrientField.ADDED_SUGARS: ("Açúcares Adicionados", "Added Sugars"),
    NutrientField.VITAMIN_A: ("Vitamina A", "Vitamin A"),
    NutrientField.VITAMIN_C: ("Vitamina C", "Vitamin C"),
    NutrientField.VITAMIN_D: ("Vitamina D", "Vitamin D"),
    NutrientField.CALCIUM: ("Cálcio", "Calcium"),
    NutrientField.IRON: ("Ferro", "Iron"),
}

# Nutrients displayed in milligrams; matched as case-insensitive substrings.
KEEP_MG_NUTRIENTS: tuple[str, ...] = (
    "Colesterol",
    "Cholesterol",
    "Sódio",
    "Sodium",
    "Potássio",
    "Potassium",
    "Cálcio",
    "Calcium",
    "Ferro",
    "Iron",
    "Vitamina A",
    "Vitamin A",
    "Vitamina C",
    "Vitamin C",
    "Vitamina D",
    "Vitamin D",
    "Vitamina B6",
    "Vitamin B6",
    "Vitamina B12",
    "Vitamin B12",
)
