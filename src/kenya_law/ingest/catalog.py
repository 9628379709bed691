"""Catalog of key Kenyan Acts to ingest.

Source: new.kenyalaw.org (Akoma Ntoso HTML). URLs follow the AKN URI pattern
/akn/ke/act/{year}/{number}/. The selection targets data protection,
cybersecurity and commercial compliance work.
"""
from __future__ import annotations
from typing import List, Optional

from .schemas import ActIndexEntry

AKN_BASE_URL = "https://new.kenyalaw.org/akn/ke/act"


def _act(id: str, title: str, short_name: str, status: str, issued: str, in_force: str,
         year: str, number: str, description: Optional[str] = None) -> ActIndexEntry:
    return ActIndexEntry(
        id=id,
        title=title,
        title_en=title,
        short_name=short_name,
        status=status,
        issued_date=issued,
        in_force_date=in_force,
        url=f"{AKN_BASE_URL}/{year}/{number}/",
        akn_year=year,
        akn_number=number,
        description=description,
    )


KEY_KENYAN_ACTS: List[ActIndexEntry] = [
    _act('data-protection-act-2019', 'Data Protection Act 2019', 'DPA 2019', 'in_force',
         '2019-11-08', '2019-11-25', '2019', '24',
         'Comprehensive data protection law establishing the Office of the Data Protection Commissioner (ODPC)'),
    _act('computer-misuse-cybercrimes-act-2018', 'Computer Misuse and Cybercrimes Act 2018', 'CMCA 2018',
         'partially_suspended', '2018-05-16', '2018-05-30', '2018', '5',
         'Comprehensive cybercrime legislation; Sections 22, 23, 24, 27, and 53 suspended by High Court '
         'pending constitutional review'),
    _act('companies-act-2015', 'Companies Act 2015', 'Companies Act', 'in_force',
         '2015-09-11', '2015-09-11', '2015', '17',
         'Modern company law framework replacing the Companies Act (Cap 486)'),
    _act('kenya-information-communications-act', 'Kenya Information and Communications Act', 'KICA',
         'in_force', '1998-01-01', '1998-01-01', '1998', '2',
         'Regulates telecommunications and ICT sector; establishes the Communications Authority of Kenya'),
    _act('consumer-protection-act-2012', 'Consumer Protection Act 2012', 'CPA 2012', 'in_force',
         '2012-12-31', '2012-12-31', '2012', '46',
         'Consumer rights and fair trade practices legislation'),
    _act('competition-act-2010', 'Competition Act 2010', 'Competition Act', 'in_force',
         '2010-12-24', '2011-08-01', '2010', '12',
         'Competition and antitrust legislation; establishes the Competition Authority of Kenya'),
    _act('national-payment-system-act-2011', 'National Payment System Act 2011', 'NPS Act', 'in_force',
         '2011-12-31', '2011-12-31', '2011', '39',
         'Regulation of payment systems including mobile money (M-Pesa)'),
    _act('central-bank-of-kenya-act', 'Central Bank of Kenya Act', 'CBK Act', 'in_force',
         '1966-01-01', '1966-01-01', '1966', '15',
         'Establishes and regulates the Central Bank of Kenya'),
    _act('constitution-of-kenya-2010', 'Constitution of Kenya 2010', 'Constitution', 'in_force',
         '2010-08-27', '2010-08-27', '2010', 'constitution',
         'Supreme law of Kenya; Article 31 guarantees the right to privacy; Article 35 guarantees '
         'the right of access to information'),
    _act('evidence-act', 'Evidence Act', 'Evidence Act', 'in_force',
         '1963-01-01', '1963-01-01', '1963', '46',
         'Law of evidence including provisions on electronic evidence and computer-generated records'),
    _act('proceeds-of-crime-aml-act-2009', 'Proceeds of Crime and Anti-Money Laundering Act 2009', 'POCAMLA',
         'in_force', '2009-12-31', '2010-06-28', '2009', '9',
         'Anti-money laundering legislation establishing the Financial Reporting Centre (FRC)'),
]


def get_act(act_id: str) -> Optional[ActIndexEntry]:
    for act in KEY_KENYAN_ACTS:
        if act.id == act_id:
            return act
    return None


__all__ = ['AKN_BASE_URL', 'KEY_KENYAN_ACTS', 'get_act']
