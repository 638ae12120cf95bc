from sueta.domain.models.user import User


def make_user(password="qwerty") -> User:
    return User(email="test@mail.com", username="test", password=password, registered_at="2022/02/10")


def test_hash_password_replaces_plaintext():
    user = make_user()

    user.hash_password()

    assert user.password != "qwerty"
    assert user.password.startswith("$2")
    assert user.verify_password("qwerty")
    assert not user.verify_password("qwerty1")


def test_hashes_are_salted():
    first, second = make_user(), make_user()

    first.hash_password()
    second.hash_password()

    assert first.password != second.password


def test_unhashed_password_never_verifies():
    assert not make_user().verify_password("qwerty")
    assert not make_user(password="").verify_password("")
