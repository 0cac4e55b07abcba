from enum import Enum

class Instrument(str, Enum):
    MOXFQ = "moxfq"  # Manchester-Oxford Foot Questionnaire
    EFAS = "efas"    # Foot/ankle score, standard + sport sections

class FormLayout(str, Enum):
    # UI layout types used by the host application's form renderers
    MOXFQ_TABLE = "MOXFQTable"
    EFAS_LAYOUT = "EFAS_Layout"
