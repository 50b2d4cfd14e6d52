from wingbeat import get_registry


class Home:
    def before_index(self):
        self.title = "Welcome"

    def get_index(self):
        io = get_registry()
        return io.view("welcome", {"title": self.title, "greeting": io.model("demo").hello()})

    def get_info(self):
        io = get_registry()
        internals = io.describe()
        return io.view(
            "info",
            {
                "title": "Framework Info",
                "controller": internals["route"]["controller"],
                "action": internals["route"]["action"],
                "instances": ", ".join(internals["instances"]),
            },
        )
