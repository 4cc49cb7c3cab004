import flet as ft

from scramble.common import config


class GameView:
    def __init__(self, page: ft.Page):
        self.page = page
        self.page.title = "Word Scramble"
        self.page.window.width = config.WINDOW_WIDTH
        self.page.window.height = config.WINDOW_HEIGHT
        self.page.padding = 20

        # Set by the controller
        self.on_submit = None
        self.on_restart = None
        self.on_error_dismissed = None

        self.build()

    def build(self):
        self.title_text = ft.Text("", size=28, weight=ft.FontWeight.BOLD)
        self.page.appbar = ft.AppBar(
            title=self.title_text,
            actions=[ft.TextButton("Restart game", on_click=self.do_restart)],
        )

        self.score_text = ft.Text("Score: 0", size=14, color=ft.Colors.GREY_400)
        self.word_input = ft.TextField(
            label="Enter your word",
            autofocus=True,
            capitalization=ft.TextCapitalization.NONE,
            on_submit=self.do_submit,
        )
        self.word_list = ft.ListView(expand=True, spacing=2)

        self.error_title = ft.Text("")
        self.error_message = ft.Text("")
        self.error_dialog = ft.AlertDialog(
            modal=True,
            title=self.error_title,
            content=self.error_message,
            actions=[ft.TextButton("OK", on_click=self.close_error_dialog)],
            actions_alignment=ft.MainAxisAlignment.END,
        )

        self.page.add(
            ft.Column([
                self.score_text,
                self.word_input,
                ft.Divider(),
                self.word_list,
            ], expand=True)
        )

    def render(self, state):
        self.title_text.value = state.root_word
        self.score_text.value = f"Score: {state.score}"
        self.word_input.value = state.current_input
        self.word_list.controls = [self.word_row(word) for word in state.used_words]
        self.page.update()

    def word_row(self, word):
        # Badge with the word length, like a numbered circle icon
        return ft.ListTile(
            leading=ft.CircleAvatar(content=ft.Text(str(len(word))), radius=14),
            title=ft.Text(word),
        )

    def show_error(self, title, message):
        self.error_title.value = title
        self.error_message.value = message
        if self.error_dialog not in self.page.overlay:
            self.page.overlay.append(self.error_dialog)
        self.error_dialog.open = True
        self.page.update()

    def close_error_dialog(self, e):
        self.error_dialog.open = False
        self.page.update()
        if self.on_error_dismissed:
            self.on_error_dismissed()

    def do_submit(self, e):
        if self.on_submit:
            self.on_submit(self.word_input.value or "")

    def do_restart(self, e):
        if self.on_restart:
            self.on_restart()
