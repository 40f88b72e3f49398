import re
from typing import Dict, List, Pattern, Tuple

from scanner.ingredients.models import IngredientCategory, IngredientDefinition, Severity

C = IngredientCategory
S = Severity

# Known ingredients of concern, in reporting order.
# Order matters: detections are reported in this order, not in label order.
INGREDIENT_CATALOG: Tuple[IngredientDefinition, ...] = (
    # Seed Oils (High Linoleic Acid)
    IngredientDefinition(
        name="Safflower Oil",
        category=C.SEED_OIL,
        severity=S.HIGH,
        description="Contains approximately 70% linoleic acid. Highly processed seed oil that may contribute to inflammation when consumed in excess.",
        aliases=("high-linoleic safflower oil", "Safflower Seed Oil", "Expeller Pressed Safflower Seed Oil", "Organic Expeller Pressed Safflower Seed Oil"),
    ),
    IngredientDefinition(
        name="Grape Seed Oil",
        category=C.SEED_OIL,
        severity=S.HIGH,
        description="Contains approximately 70% linoleic acid. Extracted using chemical solvents, may contain harmful residues.",
        aliases=("grapeseed oil",),
    ),
    IngredientDefinition(
        name="Sunflower Oil",
        category=C.SEED_OIL,
        severity=S.HIGH,
        description="Contains approximately 68% linoleic acid. Highly refined and processed, may contribute to inflammation.",
        aliases=("high-linoleic sunflower oil", "Sunflower Seed Oil", "Expeller Pressed Sunflower Seed Oil", "Organic Expeller Pressed Sunflower Seed Oil"),
    ),
    IngredientDefinition(
        name="Corn Oil",
        category=C.SEED_OIL,
        severity=S.HIGH,
        description="Contains approximately 54% linoleic acid. Highly processed and often GMO. May contain pesticide residues.",
        aliases=("maize oil", "refined corn oil"),
    ),
    IngredientDefinition(
        name="Cottonseed Oil",
        category=C.SEED_OIL,
        severity=S.HIGH,
        description="Contains approximately 52% linoleic acid. Heavily processed and may contain pesticide residues.",
        aliases=("refined cottonseed oil",),
    ),
    IngredientDefinition(
        name="Soybean Oil",
        category=C.SEED_OIL,
        severity=S.HIGH,
        description="Contains approximately 51% linoleic acid. Highly processed and often GMO. Most common seed oil in processed foods.",
        aliases=("vegetable oil", "refined soybean oil"),
    ),
    IngredientDefinition(
        name="Rice Bran Oil",
        category=C.SEED_OIL,
        severity=S.MEDIUM,
        description="Contains approximately 33% linoleic acid. Less processed than some other seed oils but still high in omega-6 fatty acids.",
        aliases=("refined rice bran oil",),
    ),
    IngredientDefinition(
        name="Peanut Oil",
        category=C.SEED_OIL,
        severity=S.MEDIUM,
        description="Contains approximately 32% linoleic acid. Common in restaurants and processed foods.",
        aliases=("groundnut oil", "refined peanut oil"),
    ),
    IngredientDefinition(
        name="Canola Oil",
        category=C.SEED_OIL,
        severity=S.MEDIUM,
        description="Contains approximately 19% linoleic acid. Highly processed rapeseed oil, often GMO.",
        aliases=("rapeseed oil", "refined canola oil"),
    ),
    IngredientDefinition(
        name="Palm Oil",
        category=C.SEED_OIL,
        severity=S.MEDIUM,
        description="Contains approximately 10% linoleic acid. Highly processed and often used in processed foods. Environmental concerns exist.",
        aliases=("refined palm oil",),
    ),
    IngredientDefinition(
        name="Palm Kernel Oil",
        category=C.SEED_OIL,
        severity=S.MEDIUM,
        description="Contains approximately 10% linoleic acid. Similar to palm oil, highly processed and used in many processed foods.",
        aliases=("refined palm kernel oil",),
    ),

    # Fruit/Animal Based Oils (Low Linoleic Acid)
    IngredientDefinition(
        name="Butter",
        category=C.ANIMAL_FAT,
        severity=S.LOW,
        description="Rich in saturated fat with minimal linoleic acid (~2%). Naturally sourced and nutrient-dense, especially when grass-fed.",
        aliases=("grass-fed butter", "cultured butter"),
    ),
    IngredientDefinition(
        name="Lard",
        category=C.ANIMAL_FAT,
        severity=S.LOW,
        description="Rendered pig fat. Linoleic acid content varies (5-20%) depending on the pig's diet. Best when sourced from pasture-raised pigs.",
        aliases=("pork fat", "rendered lard"),
    ),
    IngredientDefinition(
        name="Tallow",
        category=C.ANIMAL_FAT,
        severity=S.LOW,
        description="Beef or mutton fat with very low linoleic acid (~2%). Very stable at high heat. Ideal for cooking when from grass-fed sources.",
        aliases=("beef fat", "suet", "rendered tallow"),
    ),
    IngredientDefinition(
        name="Olive Oil",
        category=C.FRUIT_BASED_OIL,
        severity=S.LOW,
        description="Contains approximately 10% linoleic acid. Minimally processed when extra virgin. Rich in beneficial compounds.",
        aliases=("extra virgin olive oil", "EVOO"),
    ),
    IngredientDefinition(
        name="Coconut Oil",
        category=C.FRUIT_BASED_OIL,
        severity=S.LOW,
        description="Contains approximately 2% linoleic acid. Rich in MCTs. Very stable for cooking.",
        aliases=("virgin coconut oil", "refined coconut oil"),
    ),
    IngredientDefinition(
        name="Avocado Oil",
        category=C.FRUIT_BASED_OIL,
        severity=S.LOW,
        description="Contains approximately 12% linoleic acid. High in monounsaturated fats. Good for high-heat cooking.",
        aliases=("virgin avocado oil", "refined avocado oil"),
    ),

    # Thickeners
    IngredientDefinition(
        name="Carrageenan",
        category=C.THICKENER,
        severity=S.HIGH,
        description="Seaweed-derived thickener linked to inflammation and digestive issues. May promote intestinal permeability.",
        aliases=("irish moss", "E407"),
    ),
    IngredientDefinition(
        name="Xanthan Gum",
        category=C.THICKENER,
        severity=S.MEDIUM,
        description="Fermented sugar-based thickener. May cause digestive issues in sensitive individuals.",
        aliases=("E415", "corn sugar gum"),
    ),
    IngredientDefinition(
        name="Guar Gum",
        category=C.THICKENER,
        severity=S.MEDIUM,
        description="Plant-based thickener that may cause digestive issues when consumed in large amounts.",
        aliases=("E412", "guaran"),
    ),
    IngredientDefinition(
        name="Carboxymethylcellulose",
        category=C.THICKENER,
        severity=S.MEDIUM,
        description="Synthetic cellulose derivative that may alter gut bacteria and promote inflammation.",
        aliases=("cellulose gum", "CMC", "E466"),
    ),

    # Emulsifiers
    IngredientDefinition(
        name="Polysorbate 80",
        category=C.EMULSIFIER,
        severity=S.HIGH,
        description="Synthetic emulsifier that may disrupt gut bacteria and increase intestinal inflammation.",
        aliases=("E433", "polyoxyethylene (20) sorbitan monooleate"),
    ),
    # Same substance as the thickener entry, reported for its emulsifier role
    IngredientDefinition(
        name="Carrageenan",
        category=C.EMULSIFIER,
        severity=S.HIGH,
        description="Can cause inflammation and digestive issues. Often used as both thickener and emulsifier.",
        aliases=("E407",),
    ),
    IngredientDefinition(
        name="Mono and Diglycerides",
        category=C.EMULSIFIER,
        severity=S.MEDIUM,
        description="Synthetic fat-based emulsifiers that may contain trans fats. Often used in processed foods.",
        aliases=("E471", "mono-diglycerides", "mono and di-glycerides"),
    ),
    IngredientDefinition(
        name="Soy Lecithin",
        category=C.EMULSIFIER,
        severity=S.MEDIUM,
        description="Soy-derived emulsifier, often GMO. May contain residual solvents from processing.",
        aliases=("E322", "lecithin"),
    ),

    # Food Colors
    IngredientDefinition(
        name="Red 40",
        category=C.FOOD_COLOR,
        severity=S.HIGH,
        description="Petroleum-derived red dye linked to hyperactivity in children and allergic reactions.",
        aliases=("Allura Red AC", "E129", "FD&C Red 40"),
    ),
    IngredientDefinition(
        name="Yellow 5",
        category=C.FOOD_COLOR,
        severity=S.HIGH,
        description="Synthetic yellow dye associated with behavioral problems and allergic reactions.",
        aliases=("Tartrazine", "E102", "FD&C Yellow 5"),
    ),
    IngredientDefinition(
        name="Yellow 6",
        category=C.FOOD_COLOR,
        severity=S.HIGH,
        description="Artificial orange-yellow dye linked to hyperactivity and allergic reactions.",
        aliases=("Sunset Yellow FCF", "E110", "FD&C Yellow 6"),
    ),
    IngredientDefinition(
        name="Blue 1",
        category=C.FOOD_COLOR,
        severity=S.HIGH,
        description="Synthetic blue dye that may cause allergic reactions and hyperactivity.",
        aliases=("Brilliant Blue FCF", "E133", "FD&C Blue 1"),
    ),

    # Preservatives
    IngredientDefinition(
        name="BHA",
        category=C.PRESERVATIVE,
        severity=S.HIGH,
        description="Synthetic antioxidant linked to cancer in animal studies. Known endocrine disruptor.",
        aliases=("Butylated hydroxyanisole", "E320"),
    ),
    IngredientDefinition(
        name="BHT",
        category=C.PRESERVATIVE,
        severity=S.HIGH,
        description="Synthetic preservative with potential carcinogenic effects. May affect hormone function.",
        aliases=("Butylated hydroxytoluene", "E321"),
    ),
    IngredientDefinition(
        name="Sodium Nitrite",
        category=C.PRESERVATIVE,
        severity=S.HIGH,
        description="Used in cured meats. Can form carcinogenic nitrosamines when heated.",
        aliases=("E250", "nitrite"),
    ),
    IngredientDefinition(
        name="Sodium Benzoate",
        category=C.PRESERVATIVE,
        severity=S.MEDIUM,
        description="When combined with vitamin C, can form benzene, a carcinogen.",
        aliases=("E211", "benzoate"),
    ),

    # Natural Flavors
    IngredientDefinition(
        name="Natural Flavors",
        category=C.NATURAL_FLAVOR,
        severity=S.MEDIUM,
        description="Can contain up to 100 ingredients, including synthetic preservatives and solvents.",
        aliases=("natural flavoring", "natural flavourings", "natural flavor", "natural butter and cheese flavor"),
    ),
    IngredientDefinition(
        name="Natural Flavor with Other Natural Flavors",
        category=C.NATURAL_FLAVOR,
        severity=S.MEDIUM,
        description="Complex mixture of flavoring substances, often highly processed.",
        aliases=("WONF", "with other natural flavors"),
    ),

    # Phosphates
    IngredientDefinition(
        name="Sodium Phosphate",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Common phosphate additive that may contribute to kidney problems and mineral imbalances.",
        aliases=("E339", "disodium phosphate", "trisodium phosphate", "sodium phosphate monobasic", "sodium phosphate dibasic", "sodium phosphate tribasic"),
    ),
    IngredientDefinition(
        name="Phosphoric Acid",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Often used in sodas. May contribute to bone loss and kidney problems.",
        aliases=("E338", "orthophosphoric acid"),
    ),
    IngredientDefinition(
        name="Sodium Acid Pyrophosphate",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Used in baking powders and processed foods. May affect calcium absorption.",
        aliases=("E450", "SAPP", "sodium pyrophosphate"),
    ),
    IngredientDefinition(
        name="Calcium Phosphate",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Used as a leavening agent and calcium supplement. May contribute to mineral imbalances when consumed in excess.",
        aliases=("E341", "calcium phosphate monobasic", "calcium phosphate dibasic", "calcium phosphate tribasic", "tricalcium phosphate"),
    ),
    IngredientDefinition(
        name="Potassium Phosphate",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Used as a buffer and mineral supplement. May affect kidney function when consumed regularly.",
        aliases=("E340", "potassium phosphate monobasic", "potassium phosphate dibasic", "potassium phosphate tribasic"),
    ),
    IngredientDefinition(
        name="Sodium Hexametaphosphate",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Used as a sequestrant and texturizer. May interfere with mineral absorption.",
        aliases=("E452", "SHMP", "sodium polyphosphate", "Graham's salt"),
    ),
    IngredientDefinition(
        name="Sodium Tripolyphosphate",
        category=C.PHOSPHATE,
        severity=S.MEDIUM,
        description="Used as a preservative and to retain moisture. May contribute to cardiovascular issues.",
        aliases=("E451", "STPP", "pentasodium tripolyphosphate"),
    ),

    # Artificial Sweeteners
    IngredientDefinition(
        name="Aspartame",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.HIGH,
        description="Synthetic sweetener linked to headaches, dizziness, and potential neurological effects. Contains phenylalanine which is harmful for people with PKU.",
        aliases=("E951", "NutraSweet", "Equal", "AminoSweet"),
    ),
    IngredientDefinition(
        name="Sucralose",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.HIGH,
        description="Chlorinated sugar substitute that may negatively impact gut bacteria and insulin sensitivity. Studies suggest it may generate harmful compounds when heated.",
        aliases=("E955", "Splenda"),
    ),
    IngredientDefinition(
        name="Acesulfame Potassium",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.HIGH,
        description="Synthetic sweetener that may affect metabolic function and gut bacteria. Often used in combination with other artificial sweeteners.",
        aliases=("Acesulfame K", "Ace-K", "E950", "Sunett", "Sweet One"),
    ),
    IngredientDefinition(
        name="Saccharin",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.HIGH,
        description="Oldest artificial sweetener with potential links to cancer in some studies. May disrupt gut bacteria and glucose tolerance.",
        aliases=("E954", "Sweet'N Low", "Sweet Twin", "Necta Sweet"),
    ),
    IngredientDefinition(
        name="Neotame",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.HIGH,
        description="Chemical derivative of aspartame that is much sweeter. Limited long-term human studies on safety.",
        aliases=("E961", "Newtame"),
    ),
    IngredientDefinition(
        name="Advantame",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.MEDIUM,
        description="Newest FDA-approved sweetener derived from aspartame. Limited research on long-term effects.",
        aliases=("E969",),
    ),
    IngredientDefinition(
        name="Cyclamate",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.HIGH,
        description="Banned in the US since 1970 but still used in some countries. Potential carcinogenic effects in combination with saccharin.",
        aliases=("E952", "sodium cyclamate", "calcium cyclamate"),
    ),
    IngredientDefinition(
        name="Alitame",
        category=C.ARTIFICIAL_SWEETENER,
        severity=S.MEDIUM,
        description="Approved in some countries but not in the US. Limited data on long-term safety.",
        aliases=("Aclame",),
    ),
)

# Entry whose matches are suppressed by BUTTER_EXCLUSION_PATTERNS
BUTTER_NAME = "butter"

# Non-dairy butters and butter flavorings. Any of these anywhere in the text
# suppresses the Butter detection for the whole scan.
BUTTER_EXCLUSIONS: List[str] = [
    r"cocoa\s+butter",
    r"shea\s+butter",
    r"almond\s+butter",
    r"peanut\s+butter",
    r"cashew\s+butter",
    r"mango\s+butter",
    r"seed\s+butter",
    r"nut\s+butter",
    r"natural\s+butter\s+and\s+cheese\s+flavor",
    r"natural\s+butter\s+flavor",
    r"butter\s+flavor",
    r"flavored\s+with\s+butter",
]

BUTTER_EXCLUSION_PATTERNS: Tuple[Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE) for p in BUTTER_EXCLUSIONS
)


# Helper: Build reverse lookup (category → entries)
def _build_lookup(catalog: Tuple[IngredientDefinition, ...]) -> Dict[IngredientCategory, Tuple[IngredientDefinition, ...]]:
    return {
        category: tuple(d for d in catalog if d.category == category)
        for category in IngredientCategory
    }

CATALOG_BY_CATEGORY = _build_lookup(INGREDIENT_CATALOG)
