# Static word sources for dictionary-backed selection.

CURATED_WORDS = list(dict.fromkeys([
    # Everyday words
    "HOUSE", "WATER", "LIGHT", "WORLD", "MUSIC", "PLANT", "SMILE", "DREAM", "PEACE", "TRUTH",
    "FAMILY", "FRIEND", "HAPPY", "LOVE", "TIME", "LIFE", "WORK", "SCHOOL", "BOOK", "STORY",
    "NATURE", "GARDEN", "FLOWER", "TREE", "CLOUD", "RAIN", "WIND", "FIRE", "EARTH", "SKY",
    # Intermediate
    "ADVENTURE", "BEAUTIFUL", "CREATIVE", "EDUCATION", "FANTASTIC", "GENEROUS", "HAPPINESS",
    "IMPORTANT", "KNOWLEDGE", "WONDERFUL", "MOUNTAIN", "SUNSHINE", "FRIENDSHIP", "BUTTERFLY",
    "JOURNEY", "EXPLORE", "DISCOVER", "FREEDOM", "COURAGE", "WISDOM", "MEMORY", "PASSION",
    "BALANCE", "HARMONY", "COMFORT", "ENERGY", "GROWTH", "HEALTH", "SPIRIT", "GENTLE",
    # Advanced
    "MAGNIFICENT", "SPECTACULAR", "EXTRAORDINARY", "FASCINATING", "INCREDIBLE", "BRILLIANT",
    "OUTSTANDING", "REMARKABLE", "PHENOMENAL", "EXCEPTIONAL", "MYSTERIOUS", "ENCHANTING",
    "SOPHISTICATED", "ELABORATE", "INTRICATE", "COMPLEX", "PROFOUND", "SIGNIFICANT", "ULTIMATE",
    "ESSENTIAL", "FUNDAMENTAL", "COMPREHENSIVE", "EXTENSIVE", "INTENSIVE", "PROGRESSIVE",
    "SERENDIPITY", "EPHEMERAL", "WANDERLUST", "NOSTALGIA", "TRANQUIL", "LUMINOUS", "RESILIENCE",
    "QUINTESSENTIAL", "MELANCHOLY", "SYMPHONY", "SKYSCRAPER", "ELOQUENT", "INDIGENOUS", "UBIQUITOUS",
    "CONTEMPLATION", "PERSEVERANCE", "EUPHEMISM", "PARADOX", "CATALYST", "PARADIGM",
    "PINNACLE", "TRAJECTORY", "MOMENTUM", "BENCHMARK", "EQUILIBRIUM", "TRANSCENDENT",
    "CACOPHONY", "EUPHORIA", "LABYRINTH", "METAMORPHOSIS", "RENAISSANCE", "SOLITUDE", "ZENITH",
    "AMBIGUOUS", "BENEVOLENT", "CONSCIENTIOUS", "DILIGENT", "ECCENTRIC", "FLAMBOYANT", "GREGARIOUS",
    "KALEIDOSCOPE", "MIRAGE", "OASIS", "PRISM", "RIPPLE", "SHIMMER", "TWILIGHT", "VELVET",
    "WHISPER", "ZEPHYR", "BLOSSOM", "CASCADE", "DAZZLE", "EMBRACE", "FLUTTER", "GLIMMER",
    # Nature and science
    "PHOTOSYNTHESIS", "ECOSYSTEM", "BIODIVERSITY", "CONSTELLATION", "PRECIPITATION", "EVAPORATION",
    "CRYSTALLINE", "AURORA", "GRAVITATIONAL", "MOLECULAR", "ELECTROMAGNETIC", "REVOLUTIONARY",
    "ATMOSPHERIC", "GEOLOGICAL", "ASTRONOMICAL", "MICROSCOPIC", "MACROSCOPIC", "QUANTUM",
    "CHEMISTRY", "BIOLOGY", "PHYSICS", "MATHEMATICS", "GEOMETRY", "ALGEBRA", "CALCULUS",
    "NUCLEUS", "ELECTRON", "PROTON", "NEUTRON", "MOLECULE", "ATOM", "ELEMENT", "COMPOUND",
    # Academic
    "PHILOSOPHY", "PSYCHOLOGY", "ANTHROPOLOGY", "ARCHAEOLOGY", "ARCHITECTURE", "DEMOCRACY",
    "CAPITALISM", "SOCIALISM", "NATIONALISM", "GLOBALIZATION", "TECHNOLOGICAL", "INNOVATION",
    "LITERATURE", "LINGUISTICS", "SOCIOLOGY", "ECONOMICS", "POLITICS", "HISTORY", "GEOGRAPHY",
    "THEOLOGY", "METHODOLOGY", "EPISTEMOLOGY", "ONTOLOGY", "DIALECTIC", "SYNTHESIS", "ANALYSIS",
    "HYPOTHESIS", "THEORY", "CONCEPT", "PRINCIPLE", "DOCTRINE", "IDEOLOGY",
    # Personality
    "COMPASSIONATE", "EMPATHETIC", "OPTIMISTIC", "PESSIMISTIC", "CHARISMATIC", "INTROVERTED",
    "EXTROVERTED", "AMBITIOUS", "PERSISTENT", "SPONTANEOUS", "METHODICAL", "ANALYTICAL",
    "ENTHUSIASTIC", "PASSIONATE", "DETERMINED", "CONFIDENT", "HUMBLE", "PATIENT",
    "COURAGEOUS", "ADVENTUROUS", "CURIOUS", "INNOVATIVE", "INSPIRING", "MOTIVATING",
    # Arts
    "MASTERPIECE", "VIRTUOSO", "BAROQUE", "IMPRESSIONISM", "SURREALISM",
    "CONTEMPORARY", "AVANT-GARDE", "CLASSICAL", "ROMANTIC", "MINIMALIST", "EXPRESSIONISM",
    "SCULPTURE", "PAINTING", "POETRY", "DANCE", "THEATER", "CINEMA",
    "DESIGN", "FASHION", "PHOTOGRAPHY", "ILLUSTRATION", "CALLIGRAPHY",
    # Technology
    "ALGORITHM", "ARTIFICIAL", "INTELLIGENCE", "COMPUTER", "DIGITAL", "INTERNET", "NETWORK",
    "SOFTWARE", "HARDWARE", "PROGRAMMING", "DATABASE", "SECURITY", "ENCRYPTION", "BLOCKCHAIN",
    "VIRTUAL", "AUGMENTED", "REALITY", "SIMULATION", "AUTOMATION", "ROBOTICS", "MACHINE",
    "INTERFACE", "PLATFORM", "SYSTEM", "FRAMEWORK", "PROTOCOL", "INFRASTRUCTURE",
    # Food
    "CUISINE", "GOURMET", "DELICIOUS", "FLAVOR", "AROMA", "TEXTURE", "INGREDIENT", "RECIPE",
    "CULINARY", "CHEF", "KITCHEN", "RESTAURANT", "BANQUET", "FEAST", "APPETIZER", "DESSERT",
    "BEVERAGE", "COCKTAIL", "VINTAGE", "EXOTIC", "SPICE", "HERB", "SEASONING", "MARINADE",
    # Travel
    "DESTINATION", "VOYAGE", "EXPEDITION", "PILGRIMAGE", "EXCURSION", "SAFARI", "CRUISE",
    "CONTINENT", "ISLAND", "PENINSULA", "VALLEY", "PLATEAU", "DESERT", "FOREST", "JUNGLE",
    "METROPOLIS", "VILLAGE", "SUBURB", "DISTRICT", "NEIGHBORHOOD", "LANDMARK", "MONUMENT",
    "HERITAGE", "CULTURE", "TRADITION", "CUSTOMS", "FESTIVAL", "CELEBRATION", "CEREMONY",
    # Business
    "ENTREPRENEUR", "INVESTMENT", "REVENUE", "PROFIT", "MARKET", "ECONOMY",
    "STRATEGY", "MANAGEMENT", "LEADERSHIP", "ORGANIZATION", "CORPORATION", "ENTERPRISE",
    "PRODUCTIVITY", "EFFICIENCY", "QUALITY", "EXCELLENCE", "PERFORMANCE", "ACHIEVEMENT",
    "COMPETITION", "COLLABORATION", "PARTNERSHIP", "NETWORKING", "NEGOTIATION", "CONTRACT",
    # Health
    "WELLNESS", "VITALITY", "NUTRITION", "EXERCISE", "MEDITATION", "MINDFULNESS",
    "STRENGTH", "FLEXIBILITY", "ENDURANCE", "IMMUNITY", "HEALING", "THERAPY", "RECOVERY",
    "PREVENTION", "DIAGNOSIS", "TREATMENT", "MEDICINE", "PHARMACY", "HOSPITAL", "CLINIC",
    # Time
    "CHRONOLOGY", "DURATION", "MOMENT", "INSTANT", "ETERNITY", "TEMPORAL", "SEASONAL",
    "SPRING", "SUMMER", "AUTUMN", "WINTER", "DAWN", "DUSK", "MIDNIGHT", "NOON",
    "CENTURY", "DECADE", "MILLENNIUM", "ANNIVERSARY", "BIRTHDAY", "HOLIDAY", "WEEKEND",
    # Language
    "LANGUAGE", "VOCABULARY", "GRAMMAR", "SYNTAX", "SEMANTICS", "PRONUNCIATION", "ACCENT",
    "DIALECT", "CONVERSATION", "DIALOGUE", "MONOLOGUE", "SPEECH", "PRESENTATION", "LECTURE",
    "DISCUSSION", "DEBATE", "ARGUMENT", "PERSUASION", "RHETORIC", "ELOQUENCE", "ARTICULATION",
]))

DYNAMIC_WORD_POOLS = {
    "animals": ["ELEPHANT", "GIRAFFE", "PENGUIN", "DOLPHIN", "OCTOPUS", "KANGAROO", "CHAMELEON", "RHINOCEROS"],
    "colors": ["CRIMSON", "EMERALD", "SAPPHIRE", "AMBER", "VIOLET", "TURQUOISE", "MAGENTA", "BURGUNDY"],
    "professions": ["ARCHITECT", "ENGINEER", "SCIENTIST", "ARTIST", "MUSICIAN", "TEACHER", "DOCTOR", "LAWYER"],
    "countries": ["AUSTRALIA", "CANADA", "BRAZIL", "GERMANY", "JAPAN", "ITALY", "SPAIN", "FRANCE"],
    "weather": ["THUNDERSTORM", "HURRICANE", "BLIZZARD", "TORNADO", "RAINBOW", "LIGHTNING", "DRIZZLE", "HAIL"],
    "sports": ["BASKETBALL", "FOOTBALL", "TENNIS", "SWIMMING", "CYCLING", "MARATHON", "GYMNASTICS", "VOLLEYBALL"],
    "instruments": ["PIANO", "GUITAR", "VIOLIN", "TRUMPET", "SAXOPHONE", "DRUMS", "FLUTE", "CELLO"],
    "mythology": ["PHOENIX", "DRAGON", "UNICORN", "CENTAUR", "GRIFFIN", "PEGASUS", "HYDRA", "CHIMERA"],
}

GENERIC_DICTIONARY_WORDS = [
    "ANCIENT", "BRIDGE", "CASTLE", "DOLPHIN", "ELEPHANT", "FOREST", "GALAXY",
    "HARBOR", "ISLAND", "JUNGLE", "KITCHEN", "LIBRARY", "MEADOW", "NATURE",
    "OCEAN", "PALACE", "QUEEN", "RIVER", "SUNSET", "TEMPLE", "UMBRELLA",
    "VILLAGE", "WINDOW", "YELLOW", "ZEBRA", "MARBLE", "CRYSTAL", "THUNDER",
    "BUTTERFLY", "MOUNTAIN", "DIAMOND", "SILVER", "GOLDEN", "PURPLE", "ORANGE",
]

FALLBACK_WORDS = [
    ("MAGNIFICENT", "Extremely beautiful, elaborate, or impressive; inspiring great admiration or awe."),
    ("SERENDIPITY", "The occurrence and development of events by chance in a happy or beneficial way; a pleasant surprise."),
    ("WANDERLUST", "A strong desire to travel and explore the world; an irresistible urge to wander and discover new places."),
]
