"""
================================================================================
Login Page Object
================================================================================

Login form declared with pagewire fields. Every field is wired when the page
is constructed; no locator lives inside the methods.

================================================================================
"""

from pagewire.framework import Button, CheckBox, Field, Locator, PageObject, Text, TextField


class LoginPage(PageObject):
    """Login page object."""

    PAGE_NAME = "Login"
    DESCRIPTION = "Sign in form"
    URL_PATH = "/login"

    email = Field(TextField, name="Email", description="Account e-mail", locator=Locator(css="#email"))
    password = Field(TextField, name="Password", locator=Locator(id="password"))
    remember_me = Field(CheckBox, name="Remember me", locator=Locator(css="input[name='remember']"))
    submit = Field(Button, name="Sign in", locator=Locator(xpath="//button[@type='submit']"))
    error = Field(Text, name="Error message", locator=Locator(class_name="login-error"))

    def login(self, email: str, password: str, remember: bool = False) -> None:
        self.email.write(email)
        self.password.write(password)
        if remember:
            self.remember_me.check()
        self.submit.click()
