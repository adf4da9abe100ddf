"""
Create a revocation list, revoke a few credentials and check them.
"""
import logging

from rl2020 import RevocationList2020, new_credential_status


def main():
    logging.basicConfig(level=logging.DEBUG)
    revocation_list_id = "https://example.com/credentials/status/3"

    rl = RevocationList2020.new(revocation_list_id, 16)
    # make some updates to the revocation list
    rl.revoke(10)
    rl.revoke(100)
    rl.revoke(1000)
    rl.revoke(10000)

    print(rl.is_revoked(new_credential_status(revocation_list_id, 10)))
    print(rl.is_revoked(new_credential_status(revocation_list_id, 101)))

    print(rl.to_json().decode())


if __name__ == "__main__":
    main()
