import logging

from methodacl import DecisionLogger, MethodAccessController


def even_day_managers(role, clazz, method, data):
    # Managers may close accounts on even calendar days only.
    return role == "Manager" and data["day_of_month"] % 2 == 0


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s %(message)s")

    policy = [
        {"id": "no_interns", "roles": "Intern", "classes": ".*", "methods": ".*", "strategy": False},
        {"id": "teller_reads", "roles": "Teller", "classes": "Account", "methods": "get .*", "strategy": True},
        {"id": "close", "roles": ".*", "classes": "Account", "methods": "close", "strategy": even_day_managers},
    ]
    c = MethodAccessController(policy, logger_sink=DecisionLogger(as_json=True))

    print(c.permits("Teller", "Account", "get balance"))  # True
    print(c.permits(["Teller", "Intern"], "Account", "get balance"))  # False: Intern vetoes
    print(c.permits("Manager", "Account", "close", {"day_of_month": 3}))  # False
    print(c.permits("Manager", "Account", "close", {"day_of_month": 4}))  # True


if __name__ == "__main__":
    main()
