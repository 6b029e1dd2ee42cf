from src.bookstore.core.security import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_verifies(self):
        password_hash = hash_password("P@ssword1")

        assert password_hash != "P@ssword1"
        assert password_hash.startswith("$2")
        assert verify_password("P@ssword1", password_hash)

    def test_wrong_password_does_not_verify(self):
        assert not verify_password("wrong", hash_password("P@ssword1"))

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_rounds_default_to_configuration(self, test_config):
        password_hash = hash_password("P@ssword1")

        assert password_hash.split("$")[2] == f"{test_config.security.bcrypt_rounds:02d}"

    def test_explicit_rounds(self):
        assert hash_password("P@ssword1", rounds=5).split("$")[2] == "05"

    def test_malformed_hash_never_verifies(self):
        assert not verify_password("P@ssword1", "not-a-bcrypt-hash")
