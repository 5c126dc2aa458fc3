import base64

import pytest

from pa55vault.vault import (
    LOWERCASE,
    NUMBER,
    SYMBOL,
    TOKEN_LENGTH,
    UPPERCASE,
    DecryptError,
    Vault,
    pkcs7_pad,
    pkcs7_unpad,
)

INIT_CODE = "1234567890ab"


def test_encrypt_changes_code():
    vault = Vault(code=INIT_CODE)
    assert vault.code == INIT_CODE
    vault.encrypt()
    assert vault.code != INIT_CODE
    assert len(bytes.fromhex(vault.iv)) == 16


def test_decrypt_round_trip():
    vault = Vault(code=INIT_CODE)
    vault.encrypt()
    assert vault.code != INIT_CODE
    got = vault.decrypt()
    assert vault.code != INIT_CODE
    assert got == INIT_CODE


def test_encrypt_uses_fresh_iv():
    first = Vault(code=INIT_CODE)
    second = Vault(code=INIT_CODE)
    first.encrypt()
    second.encrypt()
    assert (first.iv, first.code) != (second.iv, second.code)
    assert first.decrypt() == second.decrypt() == INIT_CODE


def test_ciphertext_is_whole_blocks():
    vault = Vault(code=INIT_CODE)
    vault.encrypt()
    assert len(base64.b64decode(vault.code)) == 16


def test_generate_code():
    vault = Vault(code="")
    vault.generate_code()
    assert vault.code != ""
    assert len(vault.code) == TOKEN_LENGTH


def test_generate_code_has_every_class():
    alphabet = set(UPPERCASE + LOWERCASE + NUMBER + SYMBOL)
    for _ in range(50):
        vault = Vault()
        vault.generate_code()
        assert set(vault.code) <= alphabet
        for charset in (UPPERCASE, LOWERCASE, NUMBER, SYMBOL):
            assert any(ch in charset for ch in vault.code)


def test_generated_code_round_trips():
    vault = Vault(title="title", url="url")
    vault.generate_code()
    plain = vault.code
    vault.encrypt()
    assert vault.decrypt() == plain


@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 31])
def test_pkcs7_pad_unpad(size):
    data = bytes(range(size))
    padded = pkcs7_pad(data, 16)
    assert len(padded) % 16 == 0
    assert len(padded) > len(data)
    assert pkcs7_unpad(padded) == data


def test_pkcs7_pad_full_block():
    assert pkcs7_pad(b"", 4) == b"\x04\x04\x04\x04"


def test_pkcs7_unpad_edge_cases():
    assert pkcs7_unpad(b"") == b""
    assert pkcs7_unpad(b"\x09\x09") == b""


@pytest.mark.parametrize(
    "code, iv",
    [
        ("!!!not base64", "00" * 16),
        (base64.b64encode(b"x" * 16).decode(), "zz"),
        (base64.b64encode(b"x" * 16).decode(), "00" * 8),
        (base64.b64encode(b"x" * 5).decode(), "00" * 16),
    ],
)
def test_decrypt_errors(code, iv):
    with pytest.raises(DecryptError):
        Vault(code=code, iv=iv).decrypt()


def test_dict_round_trip():
    vault = Vault(title="title", url="url", code="code", iv="iv")
    assert vault.to_dict() == {"title": "title", "url": "url", "code": "code", "iv": "iv"}
    assert Vault.from_dict(vault.to_dict()) == vault


def test_from_dict_missing_fields():
    assert Vault.from_dict({"title": "title"}) == Vault(title="title")


def test_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError):
        Vault.from_dict({"title": 3})
    with pytest.raises(ValueError):
        Vault.from_dict(["title"])