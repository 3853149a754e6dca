class FoldError(Exception):
    def __init__(self, msg, /, operation=None):
        if operation is not None:
            super().__init__(msg, operation)
        else:
            super().__init__(msg)
        self.operation = operation

    def __str__(self):
        return self.args[0]


class EmptyInputError(FoldError):
    "a seedless fold was given nothing to fold"
    def __init__(self, operation):
        super().__init__(f"{operation} of empty sequence", operation)

    def __reduce__(self):
        # args holds the message too, which __init__ doesn't take
        return (type(self), (self.operation,))
