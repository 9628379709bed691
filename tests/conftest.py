import os
import sys

import pytest

# Ensure the `src/` directory is on sys.path so we can import `kenya_law` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from kenya_law.ingest.schemas import ParsedAct, ParsedProvision  # noqa: E402
from kenya_law.store.database import StatuteDatabase  # noqa: E402
from kenya_law.store.loader import load_act  # noqa: E402

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def _act(id, title, short_name, status, provisions):
    return ParsedAct(
        id=id,
        title=title,
        title_en=title,
        short_name=short_name,
        status=status,
        issued_date="2019-01-01",
        in_force_date="2019-01-01",
        url=f"https://new.kenyalaw.org/akn/ke/act/{id}/",
        provisions=[
            ParsedProvision(provision_ref=ref, section=ref.lstrip("arts"), title=f"Provision {ref}",
                            content=f"Text of provision {ref} for testing purposes.")
            for ref in provisions
        ],
    )


# Load order matters: the resolver breaks ties by insertion order
SAMPLE_ACTS = [
    _act("data-protection-act-2019", "Data Protection Act 2019", "DPA 2019", "in_force",
         ["s1", "s2", "s25", "s25A"]),
    _act("computer-misuse-cybercrimes-act-2018", "Computer Misuse and Cybercrimes Act 2018", "CMCA 2018",
         "partially_suspended", ["s22", "s27"]),
    _act("companies-act-cap-486", "Companies Act Cap 486", "Cap 486", "repealed", ["s1"]),
    _act("companies-act-2015", "Companies Act 2015", "Companies Act", "in_force", ["s1", "s3"]),
    _act("constitution-of-kenya-2010", "Constitution of Kenya 2010", "Constitution", "in_force",
         ["art31", "art35"]),
    _act("kenya-information-communications-act", "Kenya Information and Communications Act", "KICA",
         "amended", ["s2", "s83C"]),
    _act("digital-health-act-2023", "Digital Health Act 2023", "DHA 2023", "not_yet_in_force", ["s4"]),
]


@pytest.fixture
def db():
    store = StatuteDatabase(":memory:")
    for act in SAMPLE_ACTS:
        load_act(store, act)
    store.set_metadata("built_at", "2026-01-01T00:00:00Z")
    yield store
    store.close()


@pytest.fixture
def dpa_html():
    with open(os.path.join(FIXTURES_DIR, "data_protection_act_2019.html"), "r", encoding="utf-8") as f:
        return f.read()
