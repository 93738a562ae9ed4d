class Singleton:
    """
    Base class to implement singleton pattern.

    Any class that inherits from this will be a singleton - only one instance
    per subclass is created and reused across the application. Tests call
    `reset_instances()` to start from a fresh instance.
    """

    _instances = {}

    def __new__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__new__(cls)
        return cls._instances[cls]

    def __init__(self, *args, **kwargs):
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        super().__init__()

    @classmethod
    def reset_instances(cls):
        """Forget the cached instance of this class."""
        Singleton._instances.pop(cls, None)
