from lambda_examples.runner import main

if __name__ == "__main__":
    main(prog_name="lambda-examples")
