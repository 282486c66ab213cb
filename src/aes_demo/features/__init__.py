from .demo_aes import DemoAesCommand, DemoAesCommandHandler

__all__ = ["DemoAesCommand", "DemoAesCommandHandler"]
