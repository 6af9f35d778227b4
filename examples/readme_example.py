from dataclasses import dataclass, field

from objreflect import UNDEFINED, reflect


@dataclass
class Service:
    name: str
    replicas: int = 1
    labels: dict[str, str] = field(default_factory=dict)


def main() -> None:
    config = {
        "services": [Service("api", replicas=3), Service("worker")],
        "hooks": {"on_deploy": lambda env: f"deploying to {env}"},
    }
    ref = reflect(config)

    print(ref.get("services.0.replicas"))  # 3
    print(ref.get("services.1.port") is UNDEFINED)  # True

    ref.set("services.1.labels.tier", "batch")
    ref.set("limits.cpu", "500m")  # creates config["limits"]
    print(config["services"][1].labels, config["limits"])

    print(ref.call("hooks.on_deploy", "staging"))
    print(reflect(config["hooks"]).methods(), ref.properties())

    snapshot = ref.clone()
    snapshot["limits"] = {}
    print(config["limits"])  # unchanged

    print(ref.type(), reflect(config["services"]).type())  # Object Array


if __name__ == "__main__":
    main()
