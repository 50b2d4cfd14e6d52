from wingbeat import get_state


class Users:
    def before_edit(self):
        self.trail = ["before"]

    def get_edit(self):
        self.trail.append("get")
        return f"<h1>Editing user {get_state().params[0]}</h1>"

    def after_edit(self):
        self.trail.append("after")
