"""Shared fixtures."""

import pytest

from urlparts.config import reset_config
from urlparts.psl import RuleSet, reset_rule_set, set_rule_set
from urlparts.url import Parser, reset_default_parser

PSL_TEXT = """\
// Test copy of the Public Suffix List.
// ===BEGIN ICANN DOMAINS===

// ar
ar
com.ar

// au
au
com.au

// biz
biz

// ck
*.ck
!www.ck

// cn
cn
com.cn
中国

// com
com

// cy
*.cy

// il
il
co.il

// info
info

// jp
jp
kyoto.jp
ide.kyoto.jp
*.kawasaki.jp
!city.kawasaki.jp

// museum
museum

// na
na
us.na

// name
name

// org
org

// om
*.om
!songfest.om
!omanpost.om

// rf
рф

// uk
uk
co.uk

// us
us
ak.us
k12.ak.us

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// CentralNic
uk.com

// DynDNS.com
webhop.biz

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def psl_text():
    """Raw PSL text used by the test rule set."""
    return PSL_TEXT


@pytest.fixture
def rule_set():
    """Rule set built from the test PSL."""
    return RuleSet.build(PSL_TEXT)


@pytest.fixture
def parser(rule_set):
    """Parser bound to the test rule set."""
    return Parser(rule_set)


@pytest.fixture
def default_rule_set(rule_set):
    """Install the test rule set as the process-wide default."""
    reset_default_parser()
    set_rule_set(rule_set)
    yield rule_set
    reset_rule_set()
    reset_default_parser()


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test reads configuration from scratch."""
    reset_config()
    yield
    reset_config()
