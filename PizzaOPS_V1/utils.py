from typing import Callable


def get_input(
    input_message: str,
    fn_validation: Callable,
    error_message: str = "Erreur dans la saisie",
):
    """Demande un entier jusqu'à obtenir une saisie valide.

    - input_message: invite affichée
    - fn_validation: prédicat sur l'entier saisi
    - error_message: message affiché si la saisie est invalide
    """
    while True:
        try:
            result = int(input(input_message).strip())
            if fn_validation(result):
                return result
        except ValueError:
            pass
        print(error_message)
