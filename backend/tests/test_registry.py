from rps_arena.models import PREFIXES, SUFFIXES, generate_display_name
from rps_arena.services.arena.registry import IdentityRegistry


def test_connect_creates_fresh_identity():
    registry = IdentityRegistry(name_factory=lambda: 'NeonWolf7')
    identity = registry.connect('sid-1')
    assert identity.username == 'NeonWolf7'
    assert (identity.score, identity.wins) == (0, 0)
    assert registry.get('sid-1') is identity
    assert len(registry) == 1


def test_disconnect_is_idempotent():
    registry = IdentityRegistry()
    registry.connect('sid-1')
    assert registry.disconnect('sid-1') is not None
    assert registry.disconnect('sid-1') is None
    assert registry.get('sid-1') is None


def test_record_win_awards_reward_and_ignores_unknown():
    registry = IdentityRegistry(win_reward=10)
    identity = registry.connect('sid-1')
    registry.record_win('sid-1')
    registry.record_win('sid-1')
    registry.record_win('gone')
    assert identity.score == 20
    assert identity.wins == 2


def test_generated_names_use_word_lists():
    name = generate_display_name()
    prefix = next(p for p in PREFIXES if name.startswith(p))
    rest = name[len(prefix):]
    suffix = next(s for s in SUFFIXES if rest.startswith(s))
    number = rest[len(suffix):]
    assert number.isdigit()
    assert 0 <= int(number) < 100
