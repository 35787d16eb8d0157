from credits_generator.main import main

main()
