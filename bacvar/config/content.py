# content.py
"""
Static page prose for BacVar.
Each section is a dict with an anchor id, a kicker, a title, body paragraphs
and optional (heading, text) items. The main window renders them in order.
"""

APP_TITLE = "Bacterial Variation & Recombination"
APP_SUBTITLE = (
    "Exploring the mechanisms of heredity, mutation, and gene transfer "
    "that drive microbial evolution."
)
APP_VERSION = "v1.0"

# (label, section id) pairs shown in the navigation bar
NAV_ITEMS = [
    ("Variation", "introduction"),
    ("Transfer", "transfer"),
    ("Recombinant DNA", "recombinant"),
    ("Pioneers", "pioneers"),
]

SECTIONS = [
    {
        'id': "introduction",
        'kicker': "Fundamentals",
        'title': "Types of Variation",
        'body': [
            "Bacterial populations change via two main pathways. "
            "Understanding the distinction is crucial for genetics.",
        ],
        'items': [
            ("Phenotypic Variation (Reversible, Non-Heritable)",
             "Induced by the environment. Examples include the loss of flagella due to "
             "phenol exposure or the transition from smooth to rough colonies."),
            ("Genotypic Variation (Irreversible, Heritable)",
             "Caused by changes in the genome sequence. Driven by Mutation and Gene Transfer."),
        ],
    },
    {
        'id': "mutation",
        'kicker': "Mechanisms I",
        'title': "Spontaneous Mutation",
        'body': [
            "Mutations are alterations in the nucleotide sequence. They occur spontaneously "
            "(1 in 10^10) or can be induced by physical agents like UV light.",
        ],
        'items': [
            ("Base Substitution",
             "Transition (Purine <-> Purine) or Transversion (Purine <-> Pyrimidine)."),
            ("Frame Shift",
             "Caused by Insertion (transposons) or Deletion of base pairs."),
        ],
        'diagram': "mutation",
    },
    {
        'id': "transfer",
        'kicker': "Mechanisms II",
        'title': "Intercellular Transfer",
        'body': [
            "Bacteria can exchange DNA through three primary methods, driving evolution "
            "and antibiotic resistance.",
        ],
        'items': [
            ("Transformation",
             "Uptake of naked DNA from the environment (e.g., from dying cells)."),
            ("Transduction",
             "Bacteriophage-mediated transfer. Can be Generalized (random fragments) or "
             "Specialized (specific genes adjacent to viral integration)."),
            ("Conjugation",
             "Direct transfer via Sex Pilus (F-plasmid). Donor (F+) attaches to Recipient (F-) "
             "and transfers a single strand of DNA."),
        ],
        'diagram': "conjugation",
    },
    {
        'id': "recombinant",
        'kicker': "Biotechnology",
        'title': "Genetic Engineering",
        'body': [
            "Using restriction endonucleases (like EcoRI) and ligases to cut and paste genes "
            "into vectors (Plasmids, Cosmids, Bacteriophages). This technology enables the "
            "mass production of Insulin, Interferon and vaccines.",
        ],
        'items': [
            ("Vectors",
             "Foreign DNA carriers. Plasmids (small, circular) and Cosmids (hybrid plasmid+phage) "
             "are essential for transport."),
            ("Restriction Enzymes",
             "\"Molecular Scissors\" that cut DNA at specific base sequences (e.g., GAATTC for "
             "EcoRI), creating sticky ends."),
            ("Applications",
             "From diagnostic probes for difficult pathogens (M. leprae) to Gene Therapy using "
             "retroviral vectors."),
        ],
        'diagram': "recombinant",
    },
    {
        'id': "plasmid",
        'kicker': "The Plasmid",
        'title': "Extrachromosomal DNA",
        'body': [
            "Plasmids are small, circular dsDNA molecules that replicate autonomously. They are "
            "dispensable for survival but confer critical new properties.",
        ],
        'items': [
            ("R-Factors",
             "Carry antibiotic resistance genes. Spread rapidly causing MDR strains."),
            ("Virulence",
             "Encode toxins (E. coli enterotoxin) or adhesion factors (Fimbriae)."),
        ],
    },
]

# (name, contribution) pairs for the history section
PIONEERS = [
    ("Frederick Griffith", "Transformation (1928)"),
    ("Avery, MacLeod, McCarty", "DNA as Genetic Material (1944)"),
    ("Joshua Lederberg", "Conjugation & Transduction"),
    ("Edward Tatum", "Conjugation Co-discoverer"),
]

FOOTER_TITLE = "Genetics Research"
FOOTER_TEXT = "Visualizing the microscopic mechanisms of life."
FOOTER_NOTE = "Educational visualization based on standard microbiology curriculum."
