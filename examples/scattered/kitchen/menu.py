from flagyard import define_flag

BIG_MENU = define_flag("--big-menu", default=False, help="Include big menu")
LANGUAGE = define_flag(
    "--language",
    "-l",
    default="english,french,german",
    placeholder="LANG",
    help="Comma separated languages to print the menu in",
)


def menu() -> list[str]:
    dishes = ["soup", "bread"]
    if BIG_MENU.value:
        dishes += ["roast", "cake"]
    languages = LANGUAGE.value.split(",")
    return [f"{dish} ({language})" for dish in dishes for language in languages]
