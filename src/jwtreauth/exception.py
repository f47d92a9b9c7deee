__author__ = "NCC Group"


class JwtReauthError(Exception):
    def __init__(self, errmsg, content_type="", *args):
        Exception.__init__(self, errmsg, *args)
        self.content_type = content_type


class InvalidArgument(JwtReauthError):
    pass


class URIError(JwtReauthError):
    pass
