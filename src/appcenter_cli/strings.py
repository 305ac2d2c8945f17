"""User-facing messages."""

USER_MUST_SIGN_IN = "You are signed out. Please login to App Center"
SELECT_LOGIN_TYPE_MSG = "Please select the way you would like to login to AppCenter"
PLEASE_PROVIDE_TOKEN = "Please provide token to authenticate"
PLEASE_LOGIN_VIA_BROWSER = (
    "Please login to AppCenter in the browser window we will open, "
    "then enter your token from the browser here"
)
USER_LOGGED_OUT_MSG = "Successfully logged out from App Center"
USER_IS_NOT_LOGGED_IN_MSG = "You are not logged in to App Center"
LOGOUT_PROMPT = "Please execute logout to signoff from App Center"
NO_CODE_PUSH_DETECTED_MSG = "Please install React Native Code Push package to run this command!"
NO_CURRENT_APP_SET_MSG = "No current app is specified for App Center"
PLEASE_PROVIDE_CURRENT_APP_MSG = "Run `appcenter apps set-current` to specify current app"
PROVIDE_CURRENT_APP_PROMPT_MSG = "Please specify existant current app"
INVALID_CURRENT_APP_NAME_MSG = "Sorry, provided app name is invalid"
FAILED_TO_EXECUTE_LOGIN_MSG = "Failed to execute login to App Center"
UNSUPPORTED_LOGIN_TYPE_MSG = "Unsupported login parameter!"


def you_are_logged_in_msg(name: str) -> str:
    return f"You are logged in to App Center as {name}"


def your_current_app_msg(app_name: str) -> str:
    return f"Your current app is {app_name}"


def released_msg(label: str, app_name: str, deployment_name: str) -> str:
    return f"Successfully released {label} to {app_name}/{deployment_name}"
