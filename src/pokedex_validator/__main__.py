from pokedex_validator.cli import main

main(prog_name="pokedex-validate")
